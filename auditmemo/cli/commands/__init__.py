# auditmemo/cli/commands/__init__.py
