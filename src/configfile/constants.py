APP_NAME = "configfile"
ENV_PREFIX = "CONFIGFILE_"
ETC_FOLDER = "/etc"
