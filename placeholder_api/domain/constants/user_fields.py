"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model (API keys and store columns)"""
    ID = "id"
    NAME = "name"
    USERNAME = "username"
    EMAIL = "email"
    PASSWORD = "password"
    ADDRESS = "address"
    PHONE = "phone"
    WEBSITE = "website"
    COMPANY = "company"
    
    # Maximum lengths enforced by the users table CHECK constraints
    NAME_MAX_LENGTH = 30
    USERNAME_MAX_LENGTH = 30
    EMAIL_MAX_LENGTH = 50
    PHONE_MAX_LENGTH = 20
    WEBSITE_MAX_LENGTH = 30
    
    # Column order used when building partial UPDATE statements
    UPDATABLE = (NAME, USERNAME, EMAIL, ADDRESS, PHONE, WEBSITE, COMPANY)
