# IMPORTANT: before release, remove the 'devN' tag from the release name
__version__ = '0.1.0dev1'
