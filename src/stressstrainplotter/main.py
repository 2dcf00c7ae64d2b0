"""
Application Initialization
==========================
This module constructs the Model-View-Controller pieces and starts the Qt
Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the Data Model (ProjectState).
2. Instantiates the Main Window (View), which creates its controller.
3. Passes the Model into the View so they can communicate.
"""
import logging
import sys

from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication
import pyqtgraph as pg

from stressstrainplotter.config import ORG_ID, APP_ID, VISIBLE_APP_NAME
from stressstrainplotter.logging_config import setup_logging
from stressstrainplotter.model.state import ProjectState
from stressstrainplotter.view.main_window import MainWindow

pg.setConfigOption("background", "w")
pg.setConfigOption("foreground", "k")


def main() -> None:
    # 1. Setup Logging (Console)
    # Use logging.DEBUG and log_file="app_debug.log" during development
    setup_logging(level=logging.INFO)

    # 2. Create the Qt Application
    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)
    app = QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)

    # 3. Initialize the Data Model
    project = ProjectState()

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(project)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
