from setuptools import setup, find_packages

setup(
    name='clockinPy',
    version='0.1.0',
    description='A CLI tool for clocking in and out and summarizing daily and weekly worked time.',
    author='René Lachmann',
    packages=find_packages(exclude=['tests']),
    install_requires=[
        'tabulate',
        'python-dotenv',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'clockin=clockin.__main__:main',
        ],
    },
    include_package_data=True,
    package_data={
        '': ['clockin.env.example'],
    },
    python_requires='>=3.7',
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
)
