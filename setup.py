from setuptools import setup

setup(
    name="ip-masking",
    version="0.1.0",
    description="Validate IPv4 addresses and check them against a CIDR subnet",
    license='MIT',
    packages=['ipmasking'],
    entry_points={
        "console_scripts": [
            "ipmask=ipmasking.cli:main",
        ]
    },
    python_requires='>=3.9',
    install_requires=[
        'configobj>=5.0.9',
        'rich',
    ],
    extras_require={
        'tests': [
            'pytest',
            'pexpect',
        ],
    },
    package_data={
        'ipmasking': ['resources/*'],
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Programming Language :: Python :: 3',
    ],
    platforms=[]
)
