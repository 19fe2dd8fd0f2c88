from re import search
from setuptools import setup, find_packages

with open("src/fragment_argument_linter/version.py") as version_file:
    version = search('version = "(.*)"', version_file.read()).group(1)

with open("README.md") as readme_file:
    readme = readme_file.read()

tests_require = [
    "pytest>=7.4,<9",
    "pytest-benchmark>=4,<6",
    "pytest-describe>=2.1,<3",
]

setup(
    name="graphql-fragment-argument-linter",
    version=version,
    description="Linter for Relay-style fragment arguments in GraphQL documents,"
    " based on GraphQL-core.",
    long_description=readme,
    long_description_content_type="text/markdown",
    keywords="graphql relay fragments linter",
    license="MIT license",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "Topic :: Software Development :: Quality Assurance",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    install_requires=["graphql-core>=3.2,<3.4"],
    extras_require={"test": tests_require},
    python_requires=">=3.9,<4",
    packages=find_packages("src"),
    package_dir={"": "src"},
    # PEP-561: https://www.python.org/dev/peps/pep-0561/
    package_data={"fragment_argument_linter": ["py.typed"]},
    include_package_data=True,
    zip_safe=False,
)
