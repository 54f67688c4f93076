import logging
import os

from mapbridge import create_app

app = create_app()

if __name__ == "__main__":
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    host = os.environ.get("HOST", "127.0.0.1")
    port = int(os.environ.get("PORT", "3000"))
    app.logger.info("Server running on http://%s:%s", host, port)
    # Sólo para dev local
    app.run(host=host, port=port, debug=False)
