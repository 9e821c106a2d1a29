from __future__ import annotations
import re

SUPPORTED_EXTENSIONS = ("txt", "md", "rtf")

def extract_rtf_text(rtf_content: str) -> str:
    """Extract plain text from RTF content."""
    # Remove RTF control words and groups
    text = re.sub(r'\\\*.*?;', '', rtf_content)
    text = re.sub(r'\\[a-z]+-?\d* ?', '', text)
    text = re.sub(r'\\[^a-z]', '', text)
    text = re.sub(r'[{}]', '', text)
    text = re.sub(r'\s+', ' ', text)
    return text.strip()

def extract_markdown_text(md_content: str) -> str:
    """Extract plain text from Markdown content."""
    # code blocks go first so their contents are not treated as markup
    text = re.sub(r'```.*?```', '', md_content, flags=re.DOTALL)
    text = re.sub(r'`([^`]+)`', r'\1', text)
    text = re.sub(r'^#{1,6}\s+', '', text, flags=re.MULTILINE)
    text = re.sub(r'\*{1,2}(.*?)\*{1,2}', r'\1', text)
    text = re.sub(r'_{1,2}(.*?)_{1,2}', r'\1', text)
    text = re.sub(r'\[([^\]]+)\]\([^)]+\)', r'\1', text)
    text = re.sub(r'^-{3,}$', '', text, flags=re.MULTILINE)
    text = re.sub(r'\n\s*\n', '\n\n', text)
    return text.strip()

def file_extension(filename: str) -> str:
    return filename.lower().rsplit('.', 1)[-1] if '.' in filename else ''

def load_text(filename: str, data: bytes) -> str:
    """Decode an uploaded file and strip its markup based on the extension."""
    ext = file_extension(filename)
    if ext not in SUPPORTED_EXTENSIONS:
        raise ValueError(f"Unsupported file type: {filename!r}. Only .txt, .md and .rtf are accepted.")
    content = data.decode("utf-8")
    if ext == 'rtf':
        return extract_rtf_text(content)
    if ext == 'md':
        return extract_markdown_text(content)
    return content
