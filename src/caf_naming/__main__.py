from caf_naming.cli.main import app

if __name__ == "__main__":
    app()
