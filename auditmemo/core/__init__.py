# auditmemo/core/__init__.py
