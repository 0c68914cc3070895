# auditmemo/ui/__init__.py
