# auditmemo/__main__.py
# Allow `python -m auditmemo`

from .cli.app import app

if __name__ == "__main__":
    app()
