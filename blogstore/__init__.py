"""Blog Object Storage.

Stores blog markdown documents and images in an OCI object storage bucket
and addresses them by public object URL.
"""

__version__ = "0.1.0"
