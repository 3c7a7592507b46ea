import logging


class TopicFormatter(logging.Formatter):
    """Console formatter: short level name and the last dotted part of the logger as a topic."""

    COLORS = {
        logging.DEBUG: "\033[38;5;252m",
        logging.INFO: "\033[38;5;111m",
        logging.WARNING: "\033[38;5;229m",
        logging.ERROR: "\033[38;5;210m",
        logging.CRITICAL: "\033[38;5;217m",
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = False):
        super().__init__()
        self.use_color = use_color

    def format(self, record):
        level_name = record.levelname[:5]
        topic = record.name.split(".")[-1][:10]
        if self.use_color:
            color = self.COLORS.get(record.levelno, "")
            prefix = f"{color}{level_name:<5}{self.RESET}:{topic:<10}: "
        else:
            prefix = f"{level_name:<5}:{topic:<10}: "
        s = super().format(record)
        return "\n".join(f"{prefix}{line}" for line in s.split("\n"))


def setup_logging(level=logging.INFO, color_logs: bool = False, log_file: str = None) -> None:
    """Configure the 'netgame' logger tree for the command-line tools."""
    root_logger = logging.getLogger("netgame")
    for h in root_logger.handlers[:]:
        root_logger.removeHandler(h)
        h.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(TopicFormatter(use_color=color_logs))
    root_logger.addHandler(console_handler)
    root_logger.setLevel(level)
    root_logger.propagate = False

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="w")
            file_handler.setFormatter(TopicFormatter(use_color=False))
            root_logger.addHandler(file_handler)
            root_logger.info("Logging to file: %s", log_file)
        except OSError as e:
            root_logger.error("Could not open log file %s: %s", log_file, e)
