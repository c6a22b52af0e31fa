# sgu/core/signals.py
from PyQt6.QtCore import QObject, pyqtSignal


class GlobalSignals(QObject):
    """
    A singleton class for application-wide signals.
    Lets deep services report diagnostics without holding a reference
    to whoever is listening.

    Note: Nothing is required to be connected. Every emit is synchronous
    and happens on the caller's thread.
    """

    # Emitted whenever the index builder ignores a source: an unlistable
    # library, an unreadable or unparseable manifest, a bad app id.
    # Emits: path (str), reason (str)
    scan_skipped = pyqtSignal(str, str)


# Create a single, global instance that can be imported anywhere
global_signals = GlobalSignals()
