"""
Demo entry point: a small settings workflow shown as tabs, a tree or a wizard.
"""

import sys
import os
import logging
import argparse
from typing import Any, Dict, List, Optional

from common.constants import APP_NAME, APP_DESCRIPTION, APP_VERSION, APP_LOG_FILENAME, PAGER_LAYOUTS

logger = logging.getLogger(__name__)

LAYOUTS = PAGER_LAYOUTS

PAGE_GROUPS = {
    "network": "Connection",
    "proxy": "Connection",
}


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command-line arguments"""
    parser = argparse.ArgumentParser(description=f"{APP_NAME} - {APP_DESCRIPTION}")
    parser.add_argument("--version", action="store_true", help="Show version information and exit")
    parser.add_argument("--layout", choices=LAYOUTS, help="Navigation style (default: from config.ini)")
    parser.add_argument("--config", type=str, metavar="PATH", help="Use a custom config.ini")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the log level from config.ini",
    )
    return parser.parse_args(argv)


def print_version_info():
    """Print version and dependency information"""
    print(f"{APP_NAME} {APP_VERSION}")
    print(f"Python: {sys.version.split()[0]}")

    from PySide6 import __version__ as pyside_version

    print(f"PySide6: {pyside_version}")


def build_demo_pages(model: Dict[str, Any], config) -> list:
    """Create the settings pages editing ``model``."""
    from ui.fields import CheckBoxField, ComboBoxField, FieldGroup, LineEditField
    from ui.qt_page import QtPage

    pages = [
        QtPage(
            "general",
            "General",
            [
                LineEditField("user_name", "Name", model, required=True, focus=True,
                              help_text="Name shown in window titles and reports."),
                LineEditField("email", "E-mail", model, placeholder="user@example.com"),
            ],
            help_text="Basic information about you.",
        ),
        QtPage(
            "network",
            "Network",
            [
                LineEditField("hostname", "Hostname", model, required=True,
                              help_text="Server the application connects to."),
                CheckBoxField("use_tls", "Use TLS", model),
            ],
        ),
        QtPage(
            "proxy",
            "Proxy",
            [
                CheckBoxField("use_proxy", "Use proxy", model),
                FieldGroup(
                    "proxy_settings",
                    "Proxy server",
                    [
                        LineEditField("proxy_host", "Host", model),
                        LineEditField("proxy_port", "Port", model, placeholder="3128"),
                    ],
                    help_text="Only used when 'Use proxy' is checked.",
                ),
            ],
        ),
        QtPage(
            "appearance",
            "Appearance",
            [ComboBoxField("theme", "Theme", model, ["Dark", "Light", "System"])],
        ),
    ]

    for page in pages:
        page.store_on_leave = config.store_on_leave
        if config.initial_page and page.page_id == config.initial_page:
            page.initial = True
    return pages


def create_pager(layout: str, pages: list, config):
    """Build the pager for ``layout`` ("tabs", "tree" or "wizard")."""
    from ui.tab_pager import TabPager
    from ui.tree_pager import TreePager
    from ui.wizard_pager import WizardPager

    if layout == "tabs":
        return TabPager(pages, leave_policy=config.leave_policy)
    if layout == "tree":
        return TreePager(pages, groups=PAGE_GROUPS, leave_policy=config.leave_policy)
    if layout == "wizard":
        return WizardPager(pages, leave_policy=config.leave_policy)
    raise ValueError(f"Unknown layout: {layout!r} (expected one of {', '.join(LAYOUTS)})")


def _setup_logging(config) -> str:
    """Setup async logging and return the log file path."""
    from common.utils.async_logging import setup_async_logging
    from utils.files import get_localappdata_dir

    log_file_path = os.path.join(get_localappdata_dir(), APP_LOG_FILENAME)
    setup_async_logging(log_level=config.log_level, log_file_path=log_file_path)
    logger.info(f"Application started with log level: {config.log_level_str}")
    config.log_config_location()
    return log_file_path


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)
    if args.version:
        print_version_info()
        return 0

    from PySide6.QtWidgets import QApplication, QMainWindow
    from common.config import Config
    from utils.exception_handler import install_global_exception_handler
    from ui.wizard_pager import PagerDialog

    config = Config(custom_config_path=args.config)
    if args.log_level:
        config.set_log_level(args.log_level)
    log_file_path = _setup_logging(config)

    app = QApplication.instance() or QApplication(sys.argv)
    install_global_exception_handler(log_file_path)

    layout = args.layout or config.layout
    model: Dict[str, Any] = {}
    pager = create_pager(layout, build_demo_pages(model, config), config)

    if layout == "wizard":
        dialog = PagerDialog(pager, model, title=APP_NAME)
        dialog.resize(config.window_width, config.window_height)
        accepted = dialog.exec()
        logger.info(f"Wizard result: {dialog.result_data() if accepted else 'cancelled'}")
        return 0

    pager.init()
    window = QMainWindow()
    window.setWindowTitle(APP_NAME)
    window.setCentralWidget(pager.contents())
    window.resize(config.window_width, config.window_height)
    window.show()
    exit_code = app.exec()

    pager.store()
    logger.info(f"Final settings: {model}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
