# run.py
import sys
import os

# Lets the app start from a source checkout without installing the package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), 'src')))

from shift_wage.main import main

if __name__ == '__main__':
    main()
