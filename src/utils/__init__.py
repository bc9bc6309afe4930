# Initialize utils package
