"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    EMAIL = "email"
    PASSWORD = "password"
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    CITY = "city"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
    
    # Fields eligible for substring search
    SEARCHABLE = (EMAIL, FIRST_NAME, LAST_NAME, CITY)
    
    # Fields a general update may touch (password has its own endpoint)
    UPDATABLE = (EMAIL, FIRST_NAME, LAST_NAME, CITY)
