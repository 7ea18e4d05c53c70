"""Coloured terminal output for the vuegen CLI."""


class Colors:
    """ANSI codes used by vuegen's output."""
    HEADER = '\033[95m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'


def colorize(msg: str, *codes: str) -> str:
    """Wrap ``msg`` in the given ANSI codes and a reset."""
    return f"{''.join(codes)}{msg}{Colors.ENDC}"


def print_header(msg: str) -> None:
    print(colorize(msg, Colors.HEADER, Colors.BOLD))


def print_info(msg: str) -> None:
    print(colorize(msg, Colors.CYAN))


def print_dim(msg: str) -> None:
    """Print a secondary (dimmed) message, e.g. a created file path."""
    print(colorize(msg, Colors.DIM))


def print_success(msg: str) -> None:
    print(colorize(f"✓ {msg}", Colors.GREEN))


def print_warning(msg: str) -> None:
    """Print a warning; the command still continues."""
    print(colorize(f"⚠️  {msg}", Colors.YELLOW))


def print_error(msg: str) -> None:
    """Print an error; callers return exit code 1 afterwards."""
    print(colorize(f"❌ {msg}", Colors.RED))
