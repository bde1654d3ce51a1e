"""Cell writers and font, line, image and text renderers, combined by a provider that draws on a supplied PDF writer."""