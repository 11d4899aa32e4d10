"""Constants and shared configuration for the generate_manifest package."""

# Manifest location, relative to the google-cloud-go checkout
MANIFEST_DIR = "internal"
MANIFEST_FILE = ".repo-metadata-full.json"

# Docs URLs are built as DOCS_URL_BASE + <module> + "/latest/" + <package path>
DOCS_URL_BASE = "https://cloud.google.com/go/docs/reference/"

# Release level detection
DOC_FILE = "doc.go"
BETA_INDICATOR = "It is not stable"
MAX_SCANNED_LINES = 50

RELEASE_LEVEL_ALPHA = "alpha"
RELEASE_LEVEL_BETA = "beta"
RELEASE_LEVEL_GA = "ga"

# Fixed values for automatically generated entries
GENERATED_LANGUAGE = "Go"
GENERATED_CLIENT_LIBRARY_TYPE = "generated"

GO_MOD = "go.mod"

# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 2  # Build failed (I/O, decode or resolution error)
