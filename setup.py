from setuptools import setup, find_namespace_packages

VERSION = '0.1.0'
DESCRIPTION = 'Bucket manager'
LONG_DESCRIPTION = 'Create, delete and list Google Cloud Storage buckets with a service account'

# Setting up
setup(
        name="bucketmanager",
        version=VERSION,
        description=DESCRIPTION,
        long_description=LONG_DESCRIPTION,
        # sub-packages have no __init__.py
        packages=find_namespace_packages(include=["bucketmanager", "bucketmanager.*"]),
        python_requires=">=3.8",
        install_requires=[
            "google-auth>=2.0",
            "google-auth-httplib2>=0.1.0",
            "google-api-python-client>=2.0",
            "httplib2",
        ],
        extras_require={
            "test": ["pytest"],
        },
        entry_points={
            "console_scripts": [
                "manage-buckets=bucketmanager.cli:run",
            ],
        },
)
