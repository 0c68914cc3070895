# auditmemo/cli/__init__.py
