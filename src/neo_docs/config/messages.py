"""Result messages returned by the document, comment and category services."""

from enum import Enum


class DocumentMessage(str, Enum):
    SUCCESS = "Document found successfully"
    SUCCESS_CREATE = "Document created successfully"
    SUCCESS_EDIT = "Document edited successfully"
    SUCCESS_DELETE = "Document deleted successfully"
    USER_NOT_FOUND = "user not found"
    AUTHOR_NOT_FOUND = "author not found"
    EDITOR_NOT_FOUND = "editor not found"
    DOCUMENT_NOT_FOUND = "Document not found"
    CATEGORY_NOT_FOUND = "Category not found"
    NO_PERMISSION = "no permission"
    NEW_AUTHOR_IS_NOT_VALID = "new author do not have permission to have document"


class CommentMessage(str, Enum):
    SUCCESS = "Comment found successfully"
    SUCCESS_CREATE = "Comment created successfully"
    SUCCESS_EDIT = "Comment edited successfully"
    SUCCESS_DELETE = "Comment deleted successfully"
    USER_NOT_FOUND = "user not found"
    COMMENT_NOT_FOUND = "Comment not found"
    DOCUMENT_NOT_FOUND = "Document not found"
    PARENT_NOT_FOUND = "parent comment not found"
    PARENT_MISMATCH = "parent comment belongs to another document"
    NO_PERMISSION = "no permission"
    DISABLED = "comments are disabled"


class CategoryMessage(str, Enum):
    SUCCESS = "Category found successfully"
    SUCCESS_CREATE = "Category created successfully"
    SUCCESS_EDIT = "Category edited successfully"
    SUCCESS_DELETE = "Category deleted successfully"
    USER_NOT_FOUND = "user not found"
    AUTHOR_NOT_FOUND = "author not found"
    CATEGORY_NOT_FOUND = "Category not found"
    PARENT_NOT_FOUND = "parent category not found"
    PARENT_TOO_DEEP = "parent category can not have a parent"
    PARENT_IS_SELF = "category can not be its own parent"
    HAS_CHILDREN = "category has child categories"
    NO_PERMISSION = "no permission"
    DISABLED = "categories are disabled"


class GeneralMessage(str, Enum):
    INTERNAL_ERROR = "internal error"
    VALIDATION_ERROR = "invalid value"
    DUPLICATE_VALUE = "value already exists"
