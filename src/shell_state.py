""" Current state of the shell. """
import os


class ShellState:
    """
    Session context threaded through dispatch.

    The working directory is process-wide in the OS; every change to it
    goes through change_dir so the session always knows where it is.
    """
    def __init__(self, environ=None):
        self.environ = os.environ if environ is None else environ
        self.cwd = os.getcwd()
        self.last_status = 0

    def get_var(self, name, default=""):
        return self.environ.get(name, default)

    def change_dir(self, target: str) -> str:
        """ chdir to target; OSError or ValueError propagates and leaves cwd untouched. """
        os.chdir(target)
        self.cwd = os.getcwd()
        return self.cwd

    def set_status(self, status: int):
        self.last_status = int(status) if status is not None else 0
