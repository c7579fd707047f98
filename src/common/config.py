import os
import configparser
import logging
from PySide6.QtCore import QObject

from common.constants import APP_CONFIG_FILENAME, PAGER_LAYOUTS
from utils.files import get_localappdata_dir
from workflow.navigation import LeavePolicy

logger = logging.getLogger(__name__)


class Config(QObject):
    def __init__(self, custom_config_path: str | None = None):
        """Initialize Config from file.

        Args:
            custom_config_path: Optional path to custom config file.
                               If None, uses system config location.
        """
        super().__init__()

        if custom_config_path:
            self.config_path = custom_config_path
            logger.debug(f"Using custom config: {self.config_path}")
        else:
            # In test mode, use temp config to avoid polluting user's real config
            if "PYTEST_CURRENT_TEST" in os.environ:
                import tempfile

                test_config_dir = os.path.join(tempfile.gettempdir(), "qtpager_test")
                os.makedirs(test_config_dir, exist_ok=True)
                self.config_path = os.path.join(test_config_dir, APP_CONFIG_FILENAME)
                logger.debug(f"Test mode detected, using temp config: {self.config_path}")
            else:
                self.config_path = os.path.join(get_localappdata_dir(), APP_CONFIG_FILENAME)

        self._config = configparser.ConfigParser()
        if os.path.exists(self.config_path):
            # Existing config: Load without injecting defaults
            logger.debug(f"Loading existing config from: {self.config_path}")
            self._config.read(self.config_path, encoding="utf-8-sig")
        else:
            logger.info(f"Config file not found. Creating default config at: {self.config_path}")
            self._set_defaults()

            config_dir = os.path.dirname(self.config_path)
            if config_dir:
                os.makedirs(config_dir, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as configfile:
                self._config.write(configfile)
            logger.info("Default config.ini created successfully")

        # Initialize properties from config values (using fallbacks for missing keys)
        self._initialize_properties()

    def _get_defaults(self):
        """Get default configuration values as a dictionary structure."""
        return {
            "General": {
                "log_level": "INFO",
            },
            "Pager": {
                "leave_policy": LeavePolicy.ALWAYS.value,
                "store_on_leave": True,
                "initial_page": "",
                "layout": "tree",
            },
            "Window": {
                "width": 800,
                "height": 600,
            },
        }

    def _set_defaults(self):
        """Set default configuration values in the ConfigParser object."""
        for section, values in self._get_defaults().items():
            self._config[section] = {}
            for key, value in values.items():
                self._config[section][key] = self._to_string(value)

    @staticmethod
    def _to_string(value) -> str:
        # ConfigParser stores strings only
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def _initialize_properties(self):
        """Initialize class properties from config values with fallbacks."""
        defaults = self._get_defaults()

        self._init_general(defaults)
        self._init_pager(defaults)
        self._init_window(defaults)

        logger.debug("Configuration loaded: %s", self.config_path)

    def _init_general(self, defaults: dict):
        """Initialize General section properties."""
        g = defaults["General"]
        self.log_level_str = self._config.get("General", "log_level", fallback=g["log_level"])
        self.log_level = self._get_log_level(self.log_level_str)

    def _init_pager(self, defaults: dict):
        """Initialize Pager section properties."""
        p = defaults["Pager"]
        policy_str = self._config.get("Pager", "leave_policy", fallback=p["leave_policy"])
        try:
            self.leave_policy = LeavePolicy.from_string(policy_str)
        except ValueError:
            logger.warning(f"Invalid leave_policy '{policy_str}' in config, using '{p['leave_policy']}'")
            self.leave_policy = LeavePolicy.from_string(p["leave_policy"])
        self.store_on_leave = self._config.getboolean("Pager", "store_on_leave", fallback=p["store_on_leave"])
        self.initial_page = self._config.get("Pager", "initial_page", fallback=p["initial_page"]).strip()
        layout = self._config.get("Pager", "layout", fallback=p["layout"]).strip().lower()
        if layout not in PAGER_LAYOUTS:
            logger.warning(f"Invalid layout '{layout}' in config, using '{p['layout']}'")
            layout = p["layout"]
        self.layout = layout

    def _init_window(self, defaults: dict):
        """Initialize Window section properties."""
        w = defaults["Window"]
        self.window_width = self._config.getint("Window", "width", fallback=w["width"])
        self.window_height = self._config.getint("Window", "height", fallback=w["height"])

    def get(self, section: str, key: str, fallback: str | None = None) -> str:
        """Get a string value from the config."""
        return self._config.get(section, key, fallback=fallback)

    def get_int(self, section: str, key: str, fallback: int | None = None) -> int:
        """Get an integer value from the config."""
        return self._config.getint(section, key, fallback=fallback)

    def get_bool(self, section: str, key: str, fallback: bool | None = None) -> bool:
        """Get a boolean value from the config."""
        return self._config.getboolean(section, key, fallback=fallback)

    def set_log_level(self, level_str: str):
        """Override the log level for this run (not saved unless save() is called)."""
        self.log_level_str = level_str.upper()
        self.log_level = self._get_log_level(level_str)

    def _get_log_level(self, level_str):
        """Convert string log level to logging level constant"""
        levels = {
            "DEBUG": logging.DEBUG,
            "INFO": logging.INFO,
            "WARNING": logging.WARNING,
            "ERROR": logging.ERROR,
            "CRITICAL": logging.CRITICAL,
        }
        return levels.get(level_str.upper(), logging.INFO)  # Default to INFO if invalid

    def _update_general_section(self, config: configparser.ConfigParser):
        if not config.has_section("General"):
            config.add_section("General")
        config["General"]["log_level"] = self.log_level_str

    def _update_pager_section(self, config: configparser.ConfigParser):
        if not config.has_section("Pager"):
            config.add_section("Pager")
        config["Pager"]["leave_policy"] = self.leave_policy.value
        config["Pager"]["store_on_leave"] = self._to_string(self.store_on_leave)
        config["Pager"]["initial_page"] = self.initial_page
        config["Pager"]["layout"] = self.layout

    def _update_window_section(self, config: configparser.ConfigParser):
        if not config.has_section("Window"):
            config.add_section("Window")
        config["Window"]["width"] = str(self.window_width)
        config["Window"]["height"] = str(self.window_height)

    def _create_backup(self):
        """Create backup of config file before modifying."""
        import shutil

        if os.path.exists(self.config_path):
            backup_path = self.config_path + ".bak"
            try:
                shutil.copy2(self.config_path, backup_path)
                logger.debug(f"Created backup at {backup_path}")
            except OSError as e:
                logger.warning(f"Failed to create backup: {e}")

    def save(self):
        """Save current configuration to file with minimal mutation.

        Re-reads the existing config file, updates ONLY managed keys,
        creates a backup, and preserves all unrelated sections/keys.
        """
        current = configparser.ConfigParser()
        config_loaded = False

        if os.path.exists(self.config_path):
            try:
                current.read(self.config_path, encoding="utf-8-sig")
                config_loaded = True
            except configparser.Error as e:
                logger.warning(f"Failed to re-read config file: {e}. Will create fresh config.")

        if not config_loaded:
            logger.debug("Populating config with defaults before save")
            for section, values in self._get_defaults().items():
                current[section] = {}
                for key, value in values.items():
                    current[section][key] = self._to_string(value)

        self._create_backup()

        self._update_general_section(current)
        self._update_pager_section(current)
        self._update_window_section(current)

        try:
            with open(self.config_path, "w", encoding="utf-8") as configfile:
                current.write(configfile)
            logger.debug(f"Configuration saved to {self.config_path}")
        except OSError as e:
            logger.error(f"Failed to save config: {e}")
            raise

    def log_config_location(self):
        """Log the configuration file location (call after logging is set up)"""
        logger.info(f"Configuration loaded from: {self.config_path}")
