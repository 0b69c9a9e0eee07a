#run: flask --app yieldcalc.wsgi run --port 5000 --debug
#or:  python -m yieldcalc.wsgi

from yieldcalc.app import create_app
from yieldcalc.config import get_config

app = create_app()


if __name__ == "__main__":
    config = get_config()
    app.run(host=config.api_host, port=config.api_port, debug=config.debug)
