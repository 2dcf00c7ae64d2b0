"""
Run with: python -m stressstrainplotter
"""
from stressstrainplotter.main import main

if __name__ == "__main__":
    main()
