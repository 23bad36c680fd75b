# mvp_creator/prompts.py

# --- Constants ---
TAILWIND_CDN_URL = "https://cdn.tailwindcss.com"
TAILWIND_CDN_SCRIPT = f'<script src="{TAILWIND_CDN_URL}"></script>'
PLACEHOLDER_IMAGE_URL = "https://picsum.photos/seed/{some_random_word}/800/600"
CONTENT_TONE = "professional yet engaging"

# --- Landing Page Prompt ---
# Filled with str.format(); the template must not contain any other braces.
LANDING_PAGE_PROMPT_TEMPLATE = """
You are an expert web developer specializing in creating beautiful and effective landing pages using HTML and Tailwind CSS.

Your task is to generate the complete HTML code for a single-file landing page based on the following product idea.

Product Idea: "{product_idea}"

**Requirements:**
1.  **Single HTML File:** The entire output must be a single, valid HTML file.
2.  **Tailwind CSS:** Use Tailwind CSS for all styling. You MUST include the Tailwind CSS CDN script `{tailwind_script}` in the `<head>` section. DO NOT use any other CSS or inline styles. Use a modern, visually appealing dark theme.
3.  **Structure:** The landing page should have the following sections, tailored to the product idea:
    *   A navigation bar with the product name and a primary CTA button.
    *   A hero section with a compelling headline, a descriptive sub-headline, and a clear call-to-action button.
    *   A "Features" section that highlights 3-4 key benefits of the product, using inline SVG icons and short descriptions.
    *   A "How It Works" or "Use Cases" section explaining the product in simple steps or scenarios.
    *   A simple "Pricing" section (even if it's just a placeholder with a "Contact Us" CTA).
    *   A final call-to-action section before the footer.
    *   A simple footer with social media links (placeholders) and copyright information.
4.  **Content:** Generate all necessary copy (headlines, descriptions, button text) based on the product idea. The tone should be {tone}.
5.  **Placeholders:** Use placeholder images from `{placeholder_url}`. Use different seeds for different images to ensure variety.
6.  **Icons:** Use inline SVG for icons (e.g., for features). The SVGs should be simple and modern.
7.  **Output Format:** Your response MUST be ONLY the HTML code itself, enclosed in a single markdown code block. Do not add any explanation or commentary before or after the code block.

Example Output format:
```html
<!DOCTYPE html>
<html lang="en">
<head>
    ...
    {tailwind_script}
    ...
</head>
<body class="bg-gray-900 text-white">
    ...
</body>
</html>
```
"""


# --- Dynamic Prompt Generation ---
def create_prompt(product_idea: str) -> str:
    """Embeds the product idea into the landing page instruction template."""
    return LANDING_PAGE_PROMPT_TEMPLATE.format(
        product_idea=product_idea,
        tailwind_script=TAILWIND_CDN_SCRIPT,
        tone=CONTENT_TONE,
        placeholder_url=PLACEHOLDER_IMAGE_URL,
    )
