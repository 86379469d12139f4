"""Constants for Post model field names"""


class PostFields:
    """Field name constants for Post model (API keys and store columns)"""
    ID = "id"
    USER_ID = "userId"
    TITLE = "title"
    BODY = "body"
    USER = "user"
    
    TITLE_MAX_LENGTH = 50
    BODY_MAX_LENGTH = 300
    
    # Column order used when building partial UPDATE statements
    UPDATABLE = (TITLE, BODY, USER_ID)
