# auditmemo/memo_io/__init__.py
