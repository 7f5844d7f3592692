# Qt tests run headless; pytest-qt provides the qtbot fixture.

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
