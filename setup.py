#!/usr/bin/env python

from setuptools import setup, find_packages

setup(
    name="quake_log_tools",
    version="1.0.0",
    description="Python tools for parsing Quake 3 Arena server logs into per-match frag reports",
    author="GeNe FRAG",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "requests>=2.25.0",
        "pandas>=1.0.0",
        "openpyxl>=3.0.0",
        "matplotlib>=3.0.0",
        "flask>=2.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            # Report Tools
            "quake-match-report=quake_log_tools.tools.match_report:main",
            "quake-match-excel=quake_log_tools.tools.match_excel:main",
            "quake-kill-chart=quake_log_tools.tools.kill_chart:main",
            # HTTP API
            "quake-log-api=quake_log_tools.web.app:main",
        ],
    },
)
