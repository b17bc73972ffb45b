import os
import appdirs
import json
import logging
from pathlib import Path

# --- Application Metadata ---
APP_NAME = "ShiftWage"
APP_AUTHOR = "ShiftWage"

# --- Default Settings ---
DEFAULT_SETTINGS = {
    "default_hourly_rate": "", # Prefill for the rate field, e.g. "1000"
    "default_start_time": "",  # Prefill, HH:MM
    "default_end_time": "",    # Prefill, HH:MM
    "log_level": "INFO",
}

class AppConfig:
    def __init__(self, user_data_dir=None):
        self.app_dirs = appdirs.AppDirs(APP_NAME, APP_AUTHOR)
        self.user_data_dir = Path(user_data_dir or self.app_dirs.user_data_dir)
        self.ensure_directories_exist()
        self.settings_file = self.user_data_dir / "settings.json"
        self.load_settings()

    def ensure_directories_exist(self):
        """Create necessary directories if they don't exist."""
        directories = [
            self.user_data_dir,
            self.user_data_dir / "logs"
        ]
        for directory in directories:
            directory.mkdir(parents=True, exist_ok=True)
            try:
                os.chmod(directory, 0o700)
            except OSError as e:
                logging.warning(f"Could not set permissions on {directory}: {e}")

    def get_log_path(self):
        """Get the path to the application log file."""
        return self.user_data_dir / "logs" / "app.log"

    def load_settings(self):
        """Load settings from file, or use defaults."""
        if self.settings_file.exists():
            try:
                with open(self.settings_file, 'r', encoding='utf-8') as f:
                    loaded_settings = json.load(f)
                if not isinstance(loaded_settings, dict):
                    raise ValueError("settings file does not contain an object")
                self.settings = {**DEFAULT_SETTINGS, **loaded_settings}
            except (ValueError, IOError) as e:
                logging.error(f"Error loading settings: {e}. Using defaults.")
                self.settings = DEFAULT_SETTINGS.copy()
        else:
            self.settings = DEFAULT_SETTINGS.copy()
            self.save_settings()

    def save_settings(self):
        """Save current settings to file."""
        try:
            with open(self.settings_file, 'w', encoding='utf-8') as f:
                json.dump(self.settings, f, indent=4, ensure_ascii=False)
        except IOError as e:
            logging.error(f"Error saving settings: {e}")

    def update_setting(self, key, value):
        """Update a setting and save."""
        if key in self.settings or key in DEFAULT_SETTINGS:
            self.settings[key] = value
            self.save_settings()
        else:
            logging.warning(f"Attempted to update unknown setting key: {key}")


# Global config instance
config = AppConfig()
