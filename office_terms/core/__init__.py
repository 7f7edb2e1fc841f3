# office_terms\core\__init__.py
