# backend/wsgi.py
# Entry point for `flask --app wsgi` and WSGI servers (gunicorn wsgi:app).

from orderdesk import create_app

app = create_app()


def main():
    port = app.config["PORT"]
    app.logger.info("Backend running on http://localhost:%s", port)
    app.run(host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
