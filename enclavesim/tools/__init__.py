"""Command-line tools: debug prompt, config inspector and key generator."""