import unittest
from pathlib import Path
from unittest.mock import patch

import ffmpeg

from shear.exceptions import MetadataError
from shear.probe import get_frame_count, get_frame_rate, probe_video_stream

class TestProbe(unittest.TestCase):
    def setUp(self):
        probe_video_stream.cache_clear()
        self.test_file = Path("/tmp/fake.mkv")

    def tearDown(self):
        probe_video_stream.cache_clear()

    @patch("shear.probe.ffmpeg.probe")
    def test_get_frame_rate(self, mock_probe):
        mock_probe.return_value = {"streams": [{"codec_name": "h264", "r_frame_rate": "24000/1001"}]}
        self.assertEqual(get_frame_rate(self.test_file), (24000, 1001))
        mock_probe.assert_called_once_with("/tmp/fake.mkv", select_streams="v:0")

    @patch("shear.probe.ffmpeg.probe")
    def test_frame_rate_falls_back_to_average(self, mock_probe):
        mock_probe.return_value = {"streams": [{"r_frame_rate": "0/0", "avg_frame_rate": "25/1"}]}
        self.assertEqual(get_frame_rate(self.test_file), (25, 1))

    @patch("shear.probe.ffmpeg.probe")
    def test_frame_rate_missing(self, mock_probe):
        mock_probe.return_value = {"streams": [{"r_frame_rate": "0/0"}]}
        with self.assertRaises(MetadataError) as ctx:
            get_frame_rate(self.test_file)
        self.assertEqual(ctx.exception.property_name, "r_frame_rate")

    @patch("shear.probe.ffmpeg.probe")
    def test_get_frame_count(self, mock_probe):
        mock_probe.return_value = {"streams": [{"nb_frames": "1440"}]}
        self.assertEqual(get_frame_count(self.test_file), 1440)

    @patch("shear.probe.ffmpeg.probe")
    def test_frame_count_not_available(self, mock_probe):
        mock_probe.return_value = {"streams": [{"nb_frames": "N/A"}]}
        with self.assertRaises(MetadataError):
            get_frame_count(self.test_file)

    @patch("shear.probe.ffmpeg.probe")
    def test_no_video_stream(self, mock_probe):
        mock_probe.return_value = {"streams": []}
        with self.assertRaises(MetadataError):
            probe_video_stream(self.test_file)

    @patch("shear.probe.ffmpeg.probe")
    def test_ffprobe_failure(self, mock_probe):
        mock_probe.side_effect = ffmpeg.Error("ffprobe", b"", b"No such file or directory")
        with self.assertRaises(MetadataError) as ctx:
            probe_video_stream(self.test_file)
        self.assertIn("No such file or directory", str(ctx.exception))

    @patch("shear.probe.ffmpeg.probe")
    def test_probe_is_cached(self, mock_probe):
        mock_probe.return_value = {"streams": [{"r_frame_rate": "30/1", "nb_frames": "90"}]}
        get_frame_rate(self.test_file)
        get_frame_count(self.test_file)
        mock_probe.assert_called_once()

if __name__ == "__main__":
    unittest.main()
