from typing import Callable, Optional


class SimpleLogger:
    def __init__(self, name: str):
        self.name = name

    def log(self, message: str):
        print(f"[{self.name}-Info] {message}")

    def warning(self, message: str):
        print(f"[{self.name}-Warning] {message}")

    def error(self, message: str):
        print(f"[{self.name}-Error] {message}")


# Logger for channel system
logger = SimpleLogger(__name__)


class Channel:
    """
    Named message channel.

    Every message sent to the channel is handed to each registered watcher, typically
    `print`. The thickening pipeline reports progress to an `info` channel and failures to
    an `error` channel, and whoever runs the pipeline decides where those messages go.

    Usage:
        channel = Channel("info")
        channel.watch(print)
        channel("Path length: 12.00")
    """

    def __init__(self, name: str):
        self.name = name
        self.watchers = []

    def __repr__(self):
        return f"Channel({repr(self.name)})"

    def __call__(self, message: str, indent: Optional[bool] = True):
        if indent:
            message = "    " + message.replace("\n", "\n    ")
        for w in self.watchers[:]:
            try:
                w(message)
            except Exception as e:
                # One broken watcher must not stop delivery to the others.
                logger.warning(f"Watcher error in channel '{self.name}': {type(e).__name__}: {e}")

    def watch(self, monitor_function: Callable):
        """Add a watcher function to this channel."""
        if monitor_function not in self.watchers:
            self.watchers.append(monitor_function)

    def unwatch(self, monitor_function: Callable):
        """Remove a watcher function from this channel."""
        try:
            self.watchers.remove(monitor_function)
        except ValueError:
            logger.warning(f"Watcher {monitor_function} not found in channel '{self.name}'")
