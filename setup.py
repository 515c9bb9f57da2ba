from setuptools import setup
import os
import re

def version_from_init():
    with open("./http_throwable/__init__.py", "r") as f:
        lines = f.readlines()
        for line in lines:
            result = re.match(r'\s*__version__\s*=\s*"(\d+.\d+.\d+(.\d+)*)"', line)
            if result is not None:
                return result.group(1)
    raise RuntimeError("not found version in http_throwable/__init__.py")

def get_packages(package):
    return [
        dirpath
        for dirpath, dirnames, filenames in os.walk(package)
        if os.path.exists(os.path.join(dirpath, "__init__.py"))
    ]

_TESTS_REQUIRE = [
    "pytest >= 6",
    "pytest-cov >= 3.0.0",
]

setup(
    name="http-throwable",
    version=version_from_init(),
    description="HTTP 1.1 exception objects",
    packages = get_packages("http_throwable"),
    python_requires=">=3.8",
    install_requires = [
        "click>=7.1.0",
        "jinja2>=3.0.0",
        "pyyaml>=5.4",
        "pydantic>=2.0",
    ],
    tests_require = _TESTS_REQUIRE,
    extras_require = {
        "test": _TESTS_REQUIRE,
    },
    entry_points="""
    [console_scripts]
    http-throwable=http_throwable.main:throwable_command_line
    """,
)
