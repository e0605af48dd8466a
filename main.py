"""Jitter Clicker — Entry point."""
from src.core import constants
from src.core.console_log import ConsoleLog
from src.core.coordinator import banner_lines, build_default
from src.core.keys import key_name, parse_key


def main() -> None:
    console = ConsoleLog()
    hotkey = key_name(parse_key(constants.TOGGLE_KEY)) or constants.TOGGLE_KEY
    console.banner(banner_lines(hotkey))
    coordinator = build_default(console.log)
    coordinator.start()
    try:
        coordinator.wait_forever()
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
