"""
Development Runner
==================
Starts the plotter straight from a source checkout, without ``pip install``.

The package lives under 'src/', so that directory is put in front of
'sys.path' before importing it. Installed users run
``python -m stressstrainplotter`` instead.

Usage:
    $ python run.py
"""
import os
import sys

SRC_DIR: str = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src')
WINDOWS_APP_ID = 'StressStrainPlotter.Desktop'


def _register_windows_app_id() -> None:
    """Give the window its own taskbar entry instead of python.exe's."""
    try:
        import ctypes
        ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID(WINDOWS_APP_ID)
    except (AttributeError, ImportError):
        # Not on Windows
        pass


if __name__ == "__main__":
    sys.path.insert(0, SRC_DIR)
    _register_windows_app_id()

    from stressstrainplotter.main import main
    main()
