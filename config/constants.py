"""
Centralized constants for the JSONL validator.

Message templates, schema field names and report layout live here so the
validator and the report printer stay consistent.
"""

# Schema field names (Gemini fine-tuning format)
CONTENTS_FIELD = 'contents'
SYSTEM_INSTRUCTION_FIELD = 'systemInstruction'
ROLE_FIELD = 'role'
PARTS_FIELD = 'parts'
TEXT_FIELD = 'text'

# Defect messages, formatted with line_num (and index / part_index)
INVALID_JSON = "Line {line_num}: Invalid JSON syntax"
MISSING_CONTENTS = "Line {line_num}: Missing required field 'contents'"
CONTENTS_NOT_ARRAY = "Line {line_num}: 'contents' must be an array"
CONTENTS_EMPTY = "Line {line_num}: 'contents' array is empty"
CONTENT_MISSING_ROLE_OR_PARTS = "Line {line_num}: contents[{index}] missing 'role' or 'parts'"
CONTENT_PARTS_NOT_ARRAY = "Line {line_num}: contents[{index}].parts must be an array"
PART_MISSING_TEXT = "Line {line_num}: contents[{index}].parts[{part_index}] missing 'text' field"
SYSTEM_MISSING_ROLE = "Line {line_num}: 'systemInstruction' missing 'role' field"
SYSTEM_MISSING_PARTS = "Line {line_num}: 'systemInstruction' missing 'parts' field"
SYSTEM_PARTS_NOT_ARRAY = "Line {line_num}: 'systemInstruction.parts' must be an array"

# File discovery
DEFAULT_FILE_PATTERN = '*.jsonl'

# Report layout
BANNER_TITLE = "JSONL Validator for Gemini Fine-tuning"
BANNER_RULE = "=" * 40
FILE_SEPARATOR = "-" * 40

STATUS_STYLES = {
    'pass': ('green', '✓'),
    'fail': ('red', '✗'),
    'warn': ('yellow', '⚠'),
}

# Probe document for the JSON capability check
JSON_PROBE = '{"contents": [{"role": "user", "parts": [{"text": "probe"}]}]}'
