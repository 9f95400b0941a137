from catalog import create_app

app = create_app()

if __name__ == "__main__":
    host, port = app.config["HOST"], app.config["PORT"]
    app.logger.info("Server is running on http://%s:%s", host, port)
    app.run(host=host, port=port, debug=app.config["DEBUG"])
