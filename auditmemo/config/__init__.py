# auditmemo/config/__init__.py
