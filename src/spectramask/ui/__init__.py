"""
UI Module
=========

Start-up dialogs (source selection, notifications).
"""

from spectramask.ui.dialogs import ask_use_camera, ask_video_file, show_error, show_info

__all__ = [
    "ask_use_camera",
    "ask_video_file",
    "show_error",
    "show_info",
]
