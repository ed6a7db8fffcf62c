"""
Binary management: locating installed binaries and downloading release assets
"""
