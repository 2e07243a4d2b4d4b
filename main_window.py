# main_window.py
# This file defines the MainWindow class, the main user interface of the
# code viewer. It hosts one CodeViewer per open file in tabs, a file explorer
# dock, a profile selector to override the profile picked from the file
# extension, and an HTML export action.

import sys

from PySide6.QtWidgets import (
    QMainWindow, QMessageBox, QApplication, QStatusBar, QToolBar, QComboBox,
    QDockWidget, QTabWidget, QTreeView, QFileSystemModel, QFileDialog
)
from PySide6.QtGui import QAction, QKeySequence, QIcon
from PySide6.QtCore import Slot, Qt, QFileInfo, QDir

from code_viewer import CodeViewer
from highlight_profile import ProfileError
from html_generator import generate_html
from profile_factory import default_factory

AUTO_PROFILE = "(by extension)"
PLAIN_TEXT = "(plain text)"


class MainWindow(QMainWindow):
    BASE_TITLE = "Code Viewer"

    def __init__(self, parent=None, factory=None):
        super().__init__(parent)
        self.factory = default_factory if factory is None else factory

        self.setWindowTitle(self.BASE_TITLE)
        self.setGeometry(100, 100, 1100, 750)

        self.viewer_tabs = QTabWidget()
        self.viewer_tabs.setTabsClosable(True)
        self.viewer_tabs.tabCloseRequested.connect(self._close_viewer_tab)
        self.viewer_tabs.currentChanged.connect(self._on_current_tab_changed)
        self.setCentralWidget(self.viewer_tabs)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.status_bar.showMessage("Ready.")

        self._setup_file_explorer_dock()
        self._setup_toolbar()
        self._setup_menus()

    @property
    def current_viewer(self) -> CodeViewer | None:
        return self.viewer_tabs.currentWidget()

    def initialize_project(self, path):
        """Opens `path` if it is a file, or roots the file explorer at it if it is a folder."""
        info = QFileInfo(path)
        if info.isDir():
            self.file_system_model.setRootPath(path)
            self.file_tree_view.setRootIndex(self.file_system_model.index(path))
            self.status_bar.showMessage(f"Folder: {path}", 3000)
        elif info.isFile():
            self.open_file(path)
        else:
            print(f"MainWindow: '{path}' is neither a file nor a folder, ignoring.")

    def _setup_file_explorer_dock(self):
        self.file_explorer_dock = QDockWidget("File Explorer", self)
        self.file_tree_view = QTreeView()
        self.file_system_model = QFileSystemModel()
        default_path = QDir.homePath() if QDir.homePath() else QDir.currentPath()
        self.file_system_model.setRootPath(default_path)
        self.file_system_model.setFilter(QDir.NoDotAndDotDot | QDir.AllDirs | QDir.Files)
        self.file_tree_view.setModel(self.file_system_model)
        self.file_tree_view.setRootIndex(self.file_system_model.index(default_path))
        self.file_tree_view.doubleClicked.connect(self._open_file_from_explorer)
        self.file_tree_view.setAnimated(False)
        self.file_tree_view.setIndentation(20)
        self.file_tree_view.setSortingEnabled(True)
        self.file_tree_view.sortByColumn(0, Qt.AscendingOrder)
        for i in range(1, self.file_system_model.columnCount()):  # Hide all but name
            self.file_tree_view.setColumnHidden(i, True)
        self.file_explorer_dock.setWidget(self.file_tree_view)
        self.addDockWidget(Qt.LeftDockWidgetArea, self.file_explorer_dock)

    def _setup_toolbar(self):
        toolbar = QToolBar("Highlight Toolbar")
        self.addToolBar(toolbar)
        self.profile_selector = QComboBox()
        self.profile_selector.addItems([AUTO_PROFILE, PLAIN_TEXT, *self.factory.profile_names()])
        self.profile_selector.setToolTip("Highlight profile for the current tab")
        self.profile_selector.activated.connect(self._on_profile_selected)
        toolbar.addWidget(self.profile_selector)

    def _setup_menus(self):
        self.menu_bar = self.menuBar()
        file_menu = self.menu_bar.addMenu("&File")
        open_file_action = QAction(QIcon.fromTheme("document-open", QIcon()), "&Open File...", self)
        open_file_action.setShortcut(QKeySequence.Open)
        open_file_action.triggered.connect(self._open_file_dialog)
        file_menu.addAction(open_file_action)
        self.export_html_action = QAction("&Export as HTML...", self)
        self.export_html_action.setShortcut(QKeySequence("Ctrl+E"))
        self.export_html_action.triggered.connect(self._export_current_as_html)
        file_menu.addAction(self.export_html_action)
        file_menu.addSeparator()
        close_tab_action = QAction("&Close Tab", self)
        close_tab_action.setShortcut(QKeySequence.Close)
        close_tab_action.triggered.connect(lambda: self._close_viewer_tab(self.viewer_tabs.currentIndex()))
        file_menu.addAction(close_tab_action)
        exit_action = QAction("E&xit", self)
        exit_action.setShortcut(QKeySequence.Quit)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

    def open_file(self, file_path):
        for i in range(self.viewer_tabs.count()):
            viewer = self.viewer_tabs.widget(i)
            if viewer and viewer.property("file_path") == file_path:
                self.viewer_tabs.setCurrentIndex(i)
                return viewer

        viewer = CodeViewer(factory=self.factory)
        try:
            profile = viewer.load_file(file_path)
        except (OSError, UnicodeDecodeError) as e:
            QMessageBox.warning(self, "Error Opening File", f"Could not open file: {file_path}\n{e}")
            viewer.deleteLater()
            return None

        index = self.viewer_tabs.addTab(viewer, QFileInfo(file_path).fileName())
        self.viewer_tabs.setCurrentIndex(index)
        profile_name = profile.name if profile is not None else "plain text"
        self.status_bar.showMessage(f"Opened {file_path} ({profile_name})", 3000)
        return viewer

    def _open_file_from_explorer(self, index):
        file_path = self.file_system_model.filePath(index)
        if QFileInfo(file_path).isFile():
            self.open_file(file_path)

    def _open_file_dialog(self):
        start_dir = QDir.currentPath()
        file_path, _ = QFileDialog.getOpenFileName(self, "Open File", start_dir, "All Files (*)")
        if file_path:
            self.open_file(file_path)

    def _close_viewer_tab(self, index):
        viewer = self.viewer_tabs.widget(index)
        if viewer:
            self.viewer_tabs.removeTab(index)
            viewer.deleteLater()
        self._update_window_title()

    @Slot(int)
    def _on_profile_selected(self, _index):
        viewer = self.current_viewer
        if not viewer:
            return
        choice = self.profile_selector.currentText()
        if choice == AUTO_PROFILE:
            file_path = viewer.property("file_path")
            profile = self.factory.get_profile_for_file(file_path) if file_path else None
        elif choice == PLAIN_TEXT:
            profile = None
        else:
            try:
                profile = self.factory.get_profile_by_name(choice)
            except ProfileError as e:
                QMessageBox.critical(self, "Profile Error", str(e))
                return
        viewer.highlighter.set_profile(profile)
        self.status_bar.showMessage(f"Highlighting as: {choice}", 2000)

    def _on_current_tab_changed(self, index):
        viewer = self.current_viewer
        if viewer is not None and viewer.profile is not None:
            self.profile_selector.setCurrentText(viewer.profile.name)
        else:
            self.profile_selector.setCurrentText(AUTO_PROFILE)
        self._update_window_title()

    def _update_window_title(self):
        viewer = self.current_viewer
        if viewer:
            file_path = viewer.property("file_path")
            tab_text = QFileInfo(file_path).fileName() if file_path else self.viewer_tabs.tabText(self.viewer_tabs.currentIndex())
            self.setWindowTitle(f"{tab_text} - {self.BASE_TITLE}")
        else:
            self.setWindowTitle(self.BASE_TITLE)

    def _export_current_as_html(self):
        viewer = self.current_viewer
        if not viewer:
            self.status_bar.showMessage("Nothing to export.", 2000)
            return
        suggested = (viewer.property("file_path") or "untitled") + ".html"
        file_path, _ = QFileDialog.getSaveFileName(self, "Export as HTML", suggested, "HTML Files (*.html *.htm)")
        if not file_path:
            return
        try:
            with open(file_path, 'w', encoding='utf-8') as f:
                f.write(generate_html(viewer.line_results()))
        except OSError as e:
            QMessageBox.critical(self, "Export Error", f"Could not write file: {file_path}\n{e}")
            self.status_bar.showMessage(f"Error exporting: {e}", 5000)
            return
        self.status_bar.showMessage(f"Exported: {file_path}", 3000)


if __name__ == '__main__':
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec())
