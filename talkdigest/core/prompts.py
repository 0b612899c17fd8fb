summary_template = "Summarize the following text:\n\n{text}"
