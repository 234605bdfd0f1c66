'''
podkit | setup.py
Called to setup the podkit package.
'''

from setuptools import setup, find_packages

# README.md > long_description
with open('README.md', encoding='utf-8') as long_description_file:
    long_description = long_description_file.read()

# requirements.txt > requirements
with open('requirements.txt', encoding="UTF-8") as requirements_file:
    install_requires = requirements_file.read().splitlines()

extras_require = {
    'test': [
        'pylint',
        'pytest',
        'pytest-cov',
        'pytest-timeout',
    ]
}

if __name__ == "__main__":

    setup(
        name = 'podkit',

        version = '0.1.0',

        install_requires = install_requires,

        extras_require = extras_require,

        packages = find_packages(include=['podkit', 'podkit.*']),

        python_requires = '>=3.8',

        description = 'Python client for GPU pod lifecycle management over GraphQL.',

        long_description = long_description,

        long_description_content_type = 'text/markdown',

        classifiers = [
            'Environment :: Console',
            'Intended Audience :: Developers',
            'License :: OSI Approved :: MIT License',
            'Operating System :: OS Independent',
            'Programming Language :: Python',
            'Programming Language :: Python :: 3',
            'Topic :: Internet :: WWW/HTTP',
        ],

        include_package_data = True,

        entry_points = {
            'console_scripts': [
                'podkit = podkit.cli.entry:podkit_cli'
            ]
        },

        keywords = ['gpu', 'pod', 'graphql', 'API', 'python', 'library'],

        license = 'MIT'
    )
