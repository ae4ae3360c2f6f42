# topmark:header:start
#
#   project      : OrgCommentary
#   file         : __init__.py
#   file_relpath : src/orgcommentary/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

