"""Centralized constants for the white label generator."""
#Fixed key sets for the nested brand groups
COLOR_KEYS=("primary","secondary","background","surface","text","textSecondary")
FEATURE_KEYS=("darkMode","analytics","pushNotifications","biometric")
ASSET_KEYS=("icon","splash","logo")
#Defaults applied to a freshly added brand
DEFAULT_COLORS={"primary":"#2563eb","secondary":"#7c3aed","background":"#ffffff","surface":"#f8fafc","text":"#1e293b","textSecondary":"#64748b"}
DEFAULT_FEATURES={"darkMode":True,"analytics":True,"pushNotifications":True,"biometric":False}
DEFAULT_VERSION="1.0.0"
DEFAULT_VERSION_CODE=1
#Export filenames
ALL_CONFIGS_FILENAME="white-label-configs.json"
BUILD_SCRIPT_FILENAME="build-apk.sh"
CONFIG_FILENAME_SUFFIX="-config.json"
DEFAULT_BRAND_ID="default"
#Installer inputs and outputs (relative to the project root)
DEFAULT_CONFIG_FILE="brand-configs.json"
ENV_FILE_PATH=".env"
STRINGS_XML_PATH="android/app/src/main/res/values/strings.xml"
MANIFEST_PATH="package.json"
#Allowed asset file extensions and their MIME types
ALLOWED_IMAGE_EXTS={".png",".jpg",".jpeg",".gif",".webp",".svg"}
MIME_TYPES={".png":"image/png",".jpg":"image/jpeg",".jpeg":"image/jpeg",".gif":"image/gif",".webp":"image/webp",".svg":"image/svg+xml"}
