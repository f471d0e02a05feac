"""userhub entrypoint.

Run with:
  python -m userhub
"""

from userhub.app import create_app
from userhub.shared.config import load_config


def main() -> None:
    config = load_config()
    app = create_app()
    app.run(host=config.host, port=config.port, debug=config.debug_logging)


if __name__ == "__main__":
    main()
