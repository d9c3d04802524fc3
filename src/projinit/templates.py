"""Contents of the files written into a new project."""

from __future__ import annotations

__all__ = [
    "COVERAGERC",
    "GITIGNORE",
    "MAKEFILE",
    "PYTEST_INI",
    "README_TEMPLATE",
    "SAMPLE_TEST",
    "WORKFLOW",
]


GITIGNORE = """# Byte-compiled / optimized / DLL files
__pycache__/
*.py[cod]
*$py.class

# Virtual environment
venv/
ENV/
env/
.venv/

# Test reports
htmlcov/
.coverage
coverage.xml
*.cover
*.py,cover

# IDEs and editors
.vscode/
.idea/
*.sublime-project
*.sublime-workspace

# Logs
*.log

# Other
.DS_Store
"""

SAMPLE_TEST = """def test_sample():
    assert 1 + 1 == 2
"""

PYTEST_INI = """[pytest]
minversion = 6.0
addopts = -ra -q --cov=src
testpaths = tests
"""

COVERAGERC = """[run]
source = src
branch = True
"""

# Recipes must be indented with tabs.
MAKEFILE = (
    ".PHONY: venv install test lint format\n"
    "\n"
    "venv:\n"
    "\tpython3 -m venv venv\n"
    "\n"
    "install:\n"
    "\tpip install --upgrade pip\n"
    "\tpip install -r requirements.txt\n"
    "\tpip install -r requirements-dev.txt\n"
    "\n"
    "test:\n"
    "\tpytest\n"
    "\n"
    "lint:\n"
    "\tpylint src/\n"
    "\n"
    "format:\n"
    "\tblack src/ tests/\n"
)

README_TEMPLATE = """# {{ project_name }}

![Build Status](https://img.shields.io/github/actions/workflow/status/yourusername/{{ project_name }}/python-app.yml?branch=main)
![Coverage](https://img.shields.io/coverage/github/yourusername/{{ project_name }})
![License](https://img.shields.io/github/license/yourusername/{{ project_name }})

## Overview

{{ project_name }} is a Python project configured with Git, a virtual environment, and testing tools including Pytest, Pytest-Cov, Pylint, and Black. It ensures code quality and consistency through automated linting and formatting.

## Setup Instructions

### Prerequisites

- **Python 3.8+**: Ensure you have Python installed. You can download it from [Python's official website](https://www.python.org/downloads/).
- **Git**: Install Git from [Git's official website](https://git-scm.com/downloads).
- **GitHub CLI (optional)**: For initializing remote repositories, install GitHub CLI from [GitHub CLI](https://cli.github.com/).

### Installation

1. **Clone the Repository**

   ```bash
   git clone https://github.com/yourusername/{{ project_name }}.git
   cd {{ project_name }}
   ```

2. **Create a Virtual Environment**

   It's recommended to use a virtual environment to manage dependencies.

   ```bash
   python3 -m venv venv
   ```

3. **Activate the Virtual Environment**

   - **On macOS and Linux:**

     ```bash
     source venv/bin/activate
     ```

   - **On Windows:**

     ```bash
     venv\\Scripts\\activate
     ```

4. **Upgrade pip**

   ```bash
   pip install --upgrade pip
   ```

5. **Install Dependencies**

   ```bash
   pip install -r requirements.txt
   pip install -r requirements-dev.txt
   ```

### Running Tests

This project uses **Pytest** for testing, along with **Pytest-Cov** for coverage reports and **Pylint** for linting.

- **Run All Tests:**

  ```bash
  pytest
  ```

- **Run Tests with Coverage:**

  ```bash
  pytest --cov=src
  ```

- **Run Pylint:**

  ```bash
  pylint src/
  ```

### Code Formatting

The project uses **Black** for code formatting. You can format your code by running:

```bash
make format
```

### Linting

To lint your code using Pylint, run:

```bash
make lint
```

### Deactivating the Virtual Environment

After you're done working, you can deactivate the virtual environment:

```bash
deactivate
```

## Contributing

Contributions are welcome! Please open an issue or submit a pull request for any enhancements or bug fixes.

## License

{{ license_notice }}

## Contact

For any inquiries or suggestions, please contact [Your Name](mailto:your.email@example.com).
"""

# Versions are quoted so YAML does not read 3.10 as 3.1.
WORKFLOW = """name: Python application

on:
  push:
    branches: [ main ]
  pull_request:
    branches: [ main ]

jobs:
  build:

    runs-on: ubuntu-latest

    strategy:
      matrix:
        python-version: ["3.8", "3.9", "3.10", "3.11"]

    steps:
    - uses: actions/checkout@v4
    - name: Set up Python ${{ matrix.python-version }}
      uses: actions/setup-python@v5
      with:
        python-version: ${{ matrix.python-version }}
    - name: Install dependencies
      run: |
        python -m pip install --upgrade pip
        pip install -r requirements.txt
        pip install -r requirements-dev.txt
    - name: Lint with pylint
      run: |
        pylint src/
    - name: Test with pytest
      run: |
        pytest
    - name: Check code formatting
      run: |
        black --check src/ tests/
"""
