from PySide6.QtWidgets import QWidget, QVBoxLayout, QPushButton, QLabel, QFileDialog
from PySide6.QtCore import Signal

from profile_factory import default_factory


class WelcomePage(QWidget):
    """
    Welcome Page for the Code Viewer.
    Allows users to open a file or a folder to browse highlighted sources.
    """
    open_file_requested = Signal(str)  # Signal to emit file path
    open_folder_requested = Signal(str)  # Signal to emit folder path

    def __init__(self, parent=None, factory=None):
        super().__init__(parent)
        factory = default_factory if factory is None else factory
        self.setWindowTitle("Welcome")
        layout = QVBoxLayout(self)

        title = QLabel("Welcome to Code Viewer")
        title.setStyleSheet("font-size: 18pt; font-weight: bold;")
        layout.addWidget(title)

        profiles = QLabel("Highlight profiles: " + ", ".join(factory.profile_names()))
        profiles.setWordWrap(True)
        layout.addWidget(profiles)

        self.open_file_button = QPushButton("Open File...")
        self.open_file_button.clicked.connect(self._on_open_file)
        layout.addWidget(self.open_file_button)

        self.open_folder_button = QPushButton("Open Folder...")
        self.open_folder_button.clicked.connect(self._on_open_folder)
        layout.addWidget(self.open_folder_button)

        self.setFixedSize(400, 260)

    def _on_open_file(self):
        file_path, _ = QFileDialog.getOpenFileName(self, "Open File")
        if file_path:
            self.open_file_requested.emit(file_path)

    def _on_open_folder(self):
        folder_path = QFileDialog.getExistingDirectory(self, "Open Folder")
        if folder_path:
            self.open_folder_requested.emit(folder_path)
