"""Filesystem adapters for recognition results and exports."""

from .recognition import RecognitionLoadError, load_recognition_result, write_text_file

__all__ = ["RecognitionLoadError", "load_recognition_result", "write_text_file"]
