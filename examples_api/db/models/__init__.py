from examples_api.db.models.example import Example

__all__ = ["Example"]
