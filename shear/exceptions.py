"""Custom exceptions for the shear scene pipeline"""

class ShearError(Exception):
    """Base exception for all shear errors"""
    def __init__(self, message: str, module: str = None):
        self.message = message
        self.module = module or "unknown"
        super().__init__(f"[{self.module}] {self.message}")

class InvalidInputError(ShearError):
    """Input violates a documented precondition"""
    def __init__(self, message: str, module: str = None):
        super().__init__(f"Invalid input: {message}", module)

class ConfigurationError(ShearError):
    """Error in configuration/setup"""

class DetectionError(ShearError):
    """Scene detection could not be completed"""
    def __init__(self, message: str, module: str = None):
        super().__init__(f"Detection error: {message}", module)

class MetadataError(ShearError):
    """Raised when metadata cannot be retrieved or parsed"""
    def __init__(self, message: str, property_name: str = None):
        self.property_name = property_name
        super().__init__(f"Metadata error: {message}", "probe")

class OutputError(ShearError):
    """Scene list could not be written"""
