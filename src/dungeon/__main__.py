from pathlib import Path
import sys

from dotenv import load_dotenv

# Ensure the src directory is on sys.path when running as a script
_SRC_DIR = Path(__file__).resolve().parents[1]
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from dungeon.bootstrap import configure_logging
from dungeon.infrastructure.name_resource_validator import main as validate_names


def main(argv=None) -> int:
    load_dotenv()
    configure_logging()
    return validate_names(argv)


if __name__ == "__main__":
    raise SystemExit(main())
