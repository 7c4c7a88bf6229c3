# SPDX-License-Identifier: Apache-2.0
# Copyright Contributors to the Datever Project


"""
Datever configuration settings. Do not change this file.

Settings are determined in the following way (higher number means higher
precedence):

1) The setting is first read from this file;
2) The setting is then overridden if it is present in another settings file(s)
   pointed at by the $DATEVER_CONFIG_FILE environment variable. Note that
   multiple files are supported, separated by os.pathsep;
3) The setting is further overriden if it is present in $HOME/.dateverconfig,
   UNLESS $DATEVER_DISABLE_HOME_CONFIG is 1;
4) The setting is overridden again if the environment variable $DATEVER_XXX is
   present, where XXX is the uppercase version of the setting key. For example,
   "range_compare_mode" will be overriden by $DATEVER_RANGE_COMPARE_MODE;
5) The setting can also be overriden by the environment variable
   $DATEVER_XXX_JSON, and in this case the string is expected to be a
   JSON-encoded value.

Settings files other than this one may be python files (with a '.py'
extension) or YAML files.
"""

# flake8: noqa


###############################################################################
# Parsing
###############################################################################

# Number of parsed expressions kept in memory, keyed on the expression text.
# Set to zero to disable the cache. Read once, on the first parse.
parse_cache_size = 1024


###############################################################################
# Ranges
###############################################################################

# How two overlapping date version ranges are ordered when neither lies
# entirely before the other. Valid values are:
# - "partial": order by effective lower bound only. Ranges with the same lower
#   bound compare equal even if their upper bounds differ;
# - "lexicographic": order by effective lower bound, then by effective upper
#   bound.
range_compare_mode = "partial"


###############################################################################
# Debugging
###############################################################################

# Print each grammar production as it matches.
debug_parsing = False

# Print the anchors computed for each expression node.
debug_resolve = False

# Print the config files that were loaded.
debug_file_loads = False

# Turn on all debugging messages.
debug_all = False

# Turn off all debugging messages. This overrides debug_all.
debug_none = False

# Suppress all debugging output.
quiet = False
