"""Global CSS reset, typography and theme variables."""


def css() -> str:
    return """
/* Reset */
*, *::before, *::after { box-sizing: border-box; margin: 0; padding: 0; }
html { scroll-behavior: smooth; }

/* Theme variables */
:root {
    --bg-primary: #FFFFFF;
    --bg-secondary: #F5F5F4;
    --text-primary: #1C1917;
    --text-secondary: #44403C;
    --text-muted: #78716C;
    --accent: #B45309;
    --border-color: #E7E5E4;

    --font-display: 'Playfair Display', Georgia, serif;
    --font-body: 'Source Sans Pro', -apple-system, BlinkMacSystemFont, sans-serif;

    --space-xs: 0.25rem;
    --space-sm: 0.5rem;
    --space-md: 1rem;
    --space-lg: 1.5rem;
    --space-xl: 2rem;
    --space-2xl: 3rem;
    --space-3xl: 4rem;

    --max-width: 1080px;
}

body {
    font-family: var(--font-body);
    background: var(--bg-primary);
    color: var(--text-primary);
    line-height: 1.6;
    -webkit-font-smoothing: antialiased;
}

a { color: var(--accent); text-decoration: none; transition: color 0.2s; }
a:hover { color: var(--text-primary); }

h1, h2, h3, h4, h5, h6 { font-family: var(--font-display); font-weight: 700; line-height: 1.2; }
h1 { font-size: 2.5rem; }
h2 { font-size: 1.75rem; }
h6 { font-size: 1rem; margin-bottom: var(--space-sm); }

img { max-width: 100%; height: auto; }

.container { max-width: var(--max-width); margin: 0 auto; padding: 0 var(--space-xl); }

/* Responsive */
@media (max-width: 768px) {
    h1 { font-size: 1.75rem; }
    .container { padding: 0 var(--space-md); }
}
"""
