from __future__ import annotations

# (H) Registrar logs
PROCESSING_TYPE = "Processing {type} for reflective elements"
COLLECTED_ENTRIES = "Collected {count} reflective entries from {roots} root type(s)"
REGISTERING_ENTRY = "Registering hints for {element} with {processor}"
META_SOURCE_FOUND = "Marker on {element} reached through meta-annotation {annotation}"

# (H) Marker logs
MALFORMED_MARKER = "Ignoring marker on {element}, annotation metadata is malformed: {error}"

# (H) Processor registry logs
PROCESSOR_FACTORY_REGISTERED = "Registered processor factory under key '{key}'"
PROCESSOR_INSTANTIATED = "Instantiated reflective processor {processor}"

# (H) Reflection logs
UNREADABLE_ANNOTATIONS = "Could not evaluate annotations of {type}: {error}"
UNREADABLE_SIGNATURE = "Could not resolve type hints of {function}: {error}"

# (H) Hints logs
SYNTHESIZED_ANNOTATION = "Registering synthesized annotation hints for {type}"
