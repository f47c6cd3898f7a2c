"""
Constants for the Schema Form web UI.

Labels, messages and the browser-side snippets used for clipboard copy
and theme switching.
"""

APP_TITLE = "📁 FORM GENERATOR"

SCHEMA_PLACEHOLDER = """{
  "formTitle": "Contact Form",
  "fields": [
    {
      "id": "name",
      "type": "text",
      "label": "Name",
      "required": true
    }
  ]
}"""

NO_SCHEMA_PROMPT = "Provide a valid JSON schema to render the form."
SUCCESS_MESSAGE = "✅ Form submitted successfully!"
SUBMIT_LABEL = "Submit"
SUBMITTING_LABEL = "Submitting..."
COPY_SUCCESS_MESSAGE = "JSON copied to clipboard!"
COPY_OK = "ok"

LIGHT_MODE_LABEL = "☀️ Light mode"
DARK_MODE_LABEL = "🌙 Dark mode"

# Runs in the browser; its return value is handed to the Python callback
COPY_TO_CLIPBOARD_JS = """
async (text) => {
  try {
    await navigator.clipboard.writeText(text ?? "");
    return "ok";
  } catch (err) {
    console.error("Failed to copy JSON:", err);
    return String(err);
  }
}
"""

TOGGLE_THEME_JS = """
() => {
  document.body.classList.toggle("dark");
}
"""

ENABLE_DARK_THEME_JS = """
() => {
  document.body.classList.add("dark");
}
"""
