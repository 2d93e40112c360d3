app_name = "jalaali_datetime"
app_title = "Jalaali DateTime"
app_publisher = "OpenAI"
app_description = "Jalaali date/time value type with formatting, free-text parsing and Ramadan lookup for Frappe sites."
app_email = "support@example.com"
app_license = "MIT"

# Boot
boot_session = "jalaali_datetime.boot.boot_session"

# Jinja
jinja = {
    "methods": [
        "jalaali_datetime.api.endpoints.format_date",
    ],
}

# Fixtures / Data
fixtures = []
