"""Gallery JSON View Service Package."""

__version__ = "1.0.0"
__author__ = "Bharat kumar"
__description__ = (
    "Read-only JSON view of a photo gallery using AWS Lambda and DynamoDB"
)

__all__ = ["handlers", "core"]
