import texsmith as ts
import matplotlib.pyplot as plt

# Same seed, growing grain size: earlier cells keep their draws
scales = [1, 2, 4, 8]

fig, axes = plt.subplots(1, len(scales), figsize=(4 * len(scales), 4))

for ax, scale in zip(axes, scales):
	buf = ts.generate(width=128, height=128, variant="grain", scale=scale, seed=42,
		intensity=1., alpha=1., contrast=0.6, tint="#ffb070", tintStrength=0.35)
	ts.visu.show_texture(buf, ax=ax, title=f"scale={scale}")

plt.show()

# Data URL for embedding in CSS
buf = ts.generate(width=64, height=64, variant="film", seed=42)
url = ts.export.to_data_url(buf)
print(f"Data URL length: {len(url)} characters")
