"""Theme palettes, design tokens, sizes, variants and CSS variable generation."""