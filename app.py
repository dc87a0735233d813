"""Main entry point for the application."""

import os

from barnehage import create_app

app = create_app()


@app.route("/health")
def health_check():
    """Perform a simple health check."""
    return "OK", 200


if __name__ == "__main__":
    port = int(os.environ.get("PORT") or 3002)
    app.run(debug=True, host="0.0.0.0", port=port)  # nosec
