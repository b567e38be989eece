"""
Questions bounded context: domain layer.

- Question and QuestionId value objects
- Pagination window extraction and validation
- The error taxonomy shared by every layer
- The QuestionRepository port
"""
