from setuptools import setup, find_packages

setup(
    name='boxapi',
    version='1.0.0',
    description='Python client for v2 of the Box.com API: files and folders.',
    long_description="Files and folders of Box.com: get, create, delete, rename, move, copy, share, upload and download.",
    license='MIT',
    author='boxapi contributors',
    packages=find_packages(exclude=['test*']),
    include_package_data=True,
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    python_requires='>=3.8',
    install_requires=['requests>=2.27', 'marshmallow>=3.13',],
    extras_require={
        'test': ['httpretty', 'sure', 'pytest'],
    },

)

#PyPI updates
#
#python setup.py sdist
#python setup.py bdist_wheel
#python -m twine upload dist/*
