from setuptools import find_packages, setup

setup(
    name='pusherwire',
    version='1.0.0',
    description='Request body encoder for the Pusher Channels trigger HTTP API',
    author='',
    author_email='',
    packages=find_packages(include=['pusherwire', 'pusherwire.*']),
    python_requires='>=3.10',
    install_requires=[
        'msgspec>=0.18',
        'marshmallow>=3.13',
        'cryptography',
        'pynacl',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
)
