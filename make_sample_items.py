import pandas as pd
import numpy as np

# Number of item rows
num_items = 5

np.random.seed(42)

# Carton/crate dimensions in cm
lengths = np.random.randint(40, 240, num_items)
widths  = np.random.randint(30, 160, num_items)
heights = np.random.randint(20, 150, num_items)

# Weight from volume and a typical packed-goods density
volumes = lengths * widths * heights / 1e6          # m³
density = np.random.uniform(150, 450, num_items)    # kg/m³
weights = np.round(np.clip(volumes * density, 2, 900), 2)

palette = ['#FF5733', '#33FF57', '#3357FF', '#F3FF33', '#FF33F3', '#FF8C00', '#8A2BE2', '#00CED1']

df = pd.DataFrame({
    "name": [f"ITEM_{i+1:03d}" for i in range(num_items)],
    "length_cm": lengths,
    "width_cm": widths,
    "height_cm": heights,
    "weight_kg": weights,
    "quantity": np.random.randint(1, 40, num_items),
    "color": [palette[i % len(palette)] for i in range(num_items)],
})

df.to_csv("sample_items.csv", index=False)
# single-shape file for placement output
df.head(1).to_csv("sample_single_item.csv", index=False)

print("File created: sample_items.csv, sample_single_item.csv")
print(df)
