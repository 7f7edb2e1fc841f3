# office_terms\__main__.py
from office_terms.cli import main

if __name__ == "__main__":
    main()
