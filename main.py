import sys
from PySide6.QtWidgets import QApplication
from welcome_page import WelcomePage
from main_window import MainWindow
from html_generator import generate
from highlight_profile import ProfileError

USAGE = """usage: main.py [PATH]                  open the viewer (optionally on a file or folder)
       main.py --html INPUT OUTPUT      export INPUT as highlighted HTML to OUTPUT"""


class AppController:
    def __init__(self, app):
        self.app = app
        self.main_window = None  # Initialize as None, create when needed
        self.welcome_screen = WelcomePage()

        self.welcome_screen.open_file_requested.connect(self.launch_main_window_with_path)
        self.welcome_screen.open_folder_requested.connect(self.launch_main_window_with_path)

    def start(self, path=None):
        if path:
            self.launch_main_window_with_path(path)
        else:
            self.welcome_screen.show()

    def _ensure_main_window(self):
        if self.main_window is None:
            self.main_window = MainWindow()

    def launch_main_window_with_path(self, path):
        print(f"AppController: launch_main_window_with_path triggered with path: {path}")
        self._ensure_main_window()
        self.main_window.initialize_project(path)
        self.main_window.show()
        self.welcome_screen.close()


def export_html(args) -> int:
    if len(args) != 2:
        print("specify input and output file!", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 2
    input_file, output_file = args
    try:
        count = generate(input_file, output_file)
    except (OSError, UnicodeDecodeError, ProfileError) as e:
        print(f"Export failed: {e}", file=sys.stderr)
        return 1
    print(f"Wrote {count} lines to {output_file}")
    return 0


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if argv and argv[0] == "--html":
        return export_html(argv[1:])
    if argv and argv[0] in ("-h", "--help"):
        print(USAGE)
        return 0

    app = QApplication(sys.argv[:1])
    controller = AppController(app)
    controller.start(argv[0] if argv else None)
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
