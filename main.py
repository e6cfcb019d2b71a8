import sys
from PyQt5.QtWidgets import QApplication
from grimoire.ui import MainWindow
from grimoire.utils import setup_logging

def main():
    """
    Main function to run the notebook application.
    """
    setup_logging()
    app = QApplication(sys.argv)
    
    window = MainWindow()
    window.resize(1100, 800)
    window.show()
    sys.exit(app.exec_())

if __name__ == '__main__':
    main()
