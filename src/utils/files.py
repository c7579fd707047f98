import os
import sys
import logging

logger = logging.getLogger(__name__)


def get_localappdata_dir():
    """
    Get platform-appropriate application data directory.

    Returns:
        str: Path to application data directory

    Platform paths:
        Windows: %LOCALAPPDATA%/QtPager/
        Linux:   ~/.local/share/QtPager/ (respects XDG_DATA_HOME)
        macOS:   ~/Library/Application Support/QtPager/
    """
    from common.constants import APP_FOLDER_NAME

    # Windows: Use LOCALAPPDATA
    if sys.platform == "win32":
        local_app_data = os.getenv("LOCALAPPDATA")
        if local_app_data:
            app_data_dir = os.path.join(local_app_data, APP_FOLDER_NAME)
            os.makedirs(app_data_dir, exist_ok=True)
            return app_data_dir
        logger.warning("LOCALAPPDATA not found, using app directory")
        return get_app_dir()

    # macOS: Use Application Support
    elif sys.platform == "darwin":
        app_support = os.path.expanduser(f"~/Library/Application Support/{APP_FOLDER_NAME}")
        os.makedirs(app_support, exist_ok=True)
        return app_support

    # Linux and other Unix-like: Use XDG standard
    else:
        xdg_data = os.getenv("XDG_DATA_HOME")
        if xdg_data:
            app_data_dir = os.path.join(xdg_data, APP_FOLDER_NAME)
        else:
            app_data_dir = os.path.expanduser(f"~/.local/share/{APP_FOLDER_NAME}")
        os.makedirs(app_data_dir, exist_ok=True)
        return app_data_dir


def get_app_dir():
    """Get the directory of the executable or script."""
    meipass = getattr(sys, "_MEIPASS", None)
    if meipass:
        # Running in a PyInstaller bundle
        return os.path.dirname(sys.executable)
    return os.path.dirname(os.path.abspath(sys.argv[0]))
