# demo_app/app.py
from flask import Flask
import os, time, logging

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")

# fixed simulated latency for /work, not a knob
WORK_DELAY_MS = 100

# same demo, deployed under two names
FLAVORS = {
    "laravel": {
        "root_body": "laravel-nginx-demo ok",
        "work_body": "laravel-nginx-demo work done",
        "root_log": "laravel-nginx-demo root hit",
        "work_log": "laravel-nginx-demo work hit",
    },
    "springboot": {
        "root_body": "springboot-nginx-demo ok",
        "work_body": "springboot-nginx-demo work done",
        "root_log": "Spring Boot root endpoint called",
        "work_log": "Spring Boot work endpoint called",
    },
}

def get_flavor(name=None):
    name = (name or os.getenv("DEMO_FLAVOR", "laravel")).lower()
    if name not in FLAVORS:
        raise ValueError(f"unknown DEMO_FLAVOR {name!r}, expected one of {sorted(FLAVORS)}")
    return FLAVORS[name]

def create_app(flavor=None):
    strings = get_flavor(flavor)
    app = Flask(__name__)
    app.logger.setLevel(LOG_LEVEL)

    @app.route("/", methods=["GET"])
    def index():
        app.logger.info(strings["root_log"])
        return strings["root_body"]

    @app.route("/work", methods=["GET"])
    def work():
        app.logger.info(strings["work_log"])
        # simulate slow downstream
        time.sleep(WORK_DELAY_MS / 1000.0)
        return strings["work_body"]

    @app.route("/health", methods=["GET"])
    def health():
        return "healthy\n", 200

    return app

app = create_app()

if __name__ == "__main__":
    port = int(os.getenv("PORT", "8080"))
    app.run(host="0.0.0.0", port=port)
