"""spaCy model and component constants."""

# Default model name
DEFAULT_MODEL_NAME = "en_core_web_sm"

# spaCy component names
COMPONENT_PARSER = "parser"
COMPONENT_NER = "ner"
COMPONENT_TEXTCAT = "textcat"
COMPONENT_SENTER = "senter"

# Disabled components for annotation (tagger + lemmatizer are enough)
ANNOTATION_DISABLED = [COMPONENT_PARSER, COMPONENT_NER, COMPONENT_TEXTCAT]
