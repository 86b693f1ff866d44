"""
Start-up Dialogs
================

Notification and file-selection dialogs used once, before the video loop.

tkinter is imported lazily so headless runs (tests, --source file) never
need a display for it.
"""

import logging
from typing import List, Optional


logger = logging.getLogger(__name__)


def _root():
    import tkinter as tk

    root = tk.Tk()
    root.withdraw()
    root.attributes("-topmost", True)
    return root


def ask_use_camera() -> bool:
    """Ask whether the primary webcam should be the input source."""
    from tkinter import messagebox

    root = _root()
    try:
        return bool(messagebox.askyesno(
            "Input type",
            "Do you want to use your primary webcam as the input source?\n"
            "Selecting 'No' brings up a file dialog.",
            parent=root,
        ))
    finally:
        root.destroy()


def ask_video_file(patterns: List[str]) -> Optional[str]:
    """
    Let the user pick a video file.

    Returns:
        Selected path, or None if the dialog was cancelled
    """
    from tkinter import filedialog

    label = ", ".join(p.lstrip("*") for p in patterns)
    root = _root()
    try:
        path = filedialog.askopenfilename(
            title="Choose your video file",
            filetypes=[(f"Video files ({label})", " ".join(patterns)), ("All", "*.*")],
            parent=root,
        )
    finally:
        root.destroy()
    return path or None


def show_info(title: str, message: str) -> None:
    """Blocking information dialog."""
    from tkinter import messagebox

    root = _root()
    try:
        messagebox.showinfo(title, message, parent=root)
    finally:
        root.destroy()


def show_error(title: str, message: str) -> None:
    """Blocking error dialog."""
    from tkinter import messagebox

    root = _root()
    try:
        messagebox.showerror(title, message, parent=root)
    finally:
        root.destroy()
