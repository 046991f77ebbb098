import texsmith as ts
import matplotlib.pyplot as plt
import time

seed = 1234
variants = [v.value for v in ts.NoiseVariant]

fig, axes = plt.subplots(2, len(variants), figsize=(3 * len(variants), 6))

for col, variant in enumerate(variants):
	st = time.time()
	buf = ts.generate(width=256, height=256, variant=variant, seed=seed,
		intensity=0.8, alpha=0.9, contrast=0.3, scale=2)
	print(f"{variant}: {(time.time() - st)*1000:.1f} ms")

	# same texture over a checkerboard and over a dark background
	ts.visu.show_texture(buf, ax=axes[0, col], title=variant)
	ts.visu.show_texture(buf, background="#1b1b24", ax=axes[1, col], title=f"{variant} on dark")

	# ts.export.save(buf, ts.export.default_filename(buf.options))

plt.tight_layout()
plt.show()
