from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="jiratools",
    version="1.0.0",
    author="Your Name",
    author_email="your.email@example.com",
    description="Command-line utilities for Jira issues and a file-based comment queue",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/jiratools",
    packages=find_packages(include=["jiratools", "jiratools.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.11",
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "jiratools=jiratools.cli:cli",
            "get-jira-issue=jiratools.cli:issue",
            "update-issue=jiratools.cli:update",
            "update-issue-status=jiratools.cli:transition",
            "edit-jira-comment=jiratools.cli:edit",
            "update-comments=jiratools.cli:dispatch",
        ],
    },
)
