# src/shift_wage/main.py
"""
Main entry point for the Shift Wage application.
Sets up logging and launches the PyQt6 GUI.
"""
import sys
import logging

from shift_wage.config import config


# --- Logging Setup ---
def setup_logging():
    """Configure application logging to file and console."""
    try:
        log_file_path = config.get_log_path()
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        level_name = str(config.settings.get("log_level", "INFO")).upper()
        level = getattr(logging, level_name, logging.INFO)

        logging.basicConfig(
            level=level,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            handlers=[
                logging.FileHandler(log_file_path, encoding='utf-8'),
                logging.StreamHandler(sys.stdout) # Also print to console
            ]
        )
        logging.info("Logging system initialized. Log file: %s", log_file_path)
    except OSError as e:
        # If logging setup fails, print to console and exit
        print(f"Critical Error: Failed to setup logging: {e}")
        sys.exit(1)


# --- Main Application Entry Point ---
def main():
    """
    Main function to initialize the Shift Wage application.
    """
    setup_logging()
    logger = logging.getLogger(__name__)
    logger.info("Starting Shift Wage application.")

    logger.info("Initializing PyQt6 GUI...")
    try:
        from PyQt6.QtWidgets import QApplication
        from shift_wage.ui.main_window import MainWindow

        app = QApplication.instance()
        if app is None:
            app = QApplication(sys.argv)
            logger.debug("Created new QApplication instance.")

        window = MainWindow()
        window.show()

        logger.info("Main window shown. Starting GUI event loop.")
        exit_code = app.exec()
        logger.info(f"GUI event loop finished with exit code: {exit_code}")
        sys.exit(exit_code)

    except ImportError as e:
        logger.critical(f"Failed to import PyQt6 modules: {e}", exc_info=True)
        print("Critical Error: Required GUI libraries (PyQt6) are missing or not installed correctly.")
        sys.exit(1)


# The application should normally be started via run.py or the shift-wage script
if __name__ == "__main__":
    main()
