"""
shear - Scene change detection for chunked video encoding

This package provides the scene-boundary stage of a chunked encoding pipeline:
- Detects scene changes with PySceneDetect
- Normalizes detected boundaries into ascending scene starts
- Splits scenes longer than a maximum length into near-equal chunks
- Writes one scene-start frame index per line for the encoder

Scene lengths are bounded by whichever of a seconds-based and a
frame-count-based limit is smaller.
"""

__version__ = "0.1.0"
