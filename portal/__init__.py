# portal/__init__.py
