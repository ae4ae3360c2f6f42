# topmark:header:start
#
#   project      : OrgCommentary
#   file         : __init__.py
#   file_relpath : src/orgcommentary/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""OrgCommentary conversion pipeline package.

- Context handling and the per-axis status of one conversion
- Step implementations (reader, resolver, companion, scanner, renderer, ...)
- Commentary processors, bound to file types
- Pipeline assembly and execution helpers

The public entry points are composed of the pipeline factories in
`orgcommentary.pipeline.pipelines`, the runner in
`orgcommentary.pipeline.runner`, and the context model in
`orgcommentary.pipeline.context`.
"""
