"""Constants mirrored from ttf2mesh.h."""

# status codes returned by ttf_load_*, ttf_glyph2mesh*, ttf_export_to_obj
TTF_DONE = 0
TTF_ERR_NOMEM = 1
TTF_ERR_SIZE = 2
TTF_ERR_OPEN = 3
TTF_ERR_VER = 4
TTF_ERR_FMT = 5
TTF_ERR_NO_TAB = 6
TTF_ERR_CSUM = 7
TTF_ERR_UTAB = 8
TTF_ERR_MESHER = 9
TTF_ERR_NO_OUTLINE = 10
TTF_ERR_WRITING = 11

# feature flags for ttf_glyph2mesh*
TTF_FEATURES_DFLT = 0
TTF_FEATURE_IGN_ERR = 1

# quality presets
TTF_QUALITY_LOW = 10
TTF_QUALITY_NORMAL = 20
TTF_QUALITY_HIGH = 50

# range the engine clamps custom quality into
TTF_QUALITY_MIN = 8
TTF_QUALITY_MAX = 128
