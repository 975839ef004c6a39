import logging

import uvicorn
from winewithpete.api.api_run import app
from winewithpete.utilities.config import APP_HOST, APP_PORT, DATA_DIR, DEBUG, LOG_LEVEL


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    # Print a friendly message that points to the URL you can open in a browser
    print(f"Wine With Pete API on http://localhost:{APP_PORT} (Press CTRL+C to quit)")
    if DEBUG:
        print(f"Debug mode; data files under {DATA_DIR}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())
