from setuptools import setup, find_packages

with open('requirements.txt') as f:
    required = f.read().splitlines()

setup(
    name = 'tomcat-clickstack-setup',
    version = '0.1.0',
    description = 'Generate Tomcat context.xml and server.xml from clickstack deployment metadata',
    packages = find_packages(include=['clickstack', 'clickstack.*']),
    python_requires = '>=3.10',
    install_requires = required,
    extras_require = {
        'test': ['pytest', 'pytest-cov'],
    },
    entry_points = {
        'console_scripts': [
            'clickstack-setup = clickstack.cli:main',
        ],
    },
)
