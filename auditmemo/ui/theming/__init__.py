# auditmemo/ui/theming/__init__.py
