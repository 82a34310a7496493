APP_NAME = "envbucket"
