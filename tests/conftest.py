"""Shared generated-source fixtures."""

from pathlib import Path
from textwrap import dedent

import pytest

CONTEXT_CS = dedent("""
    namespace Inventory.Data
    {
        using System;
        using System.Data.Entity;
        using System.ComponentModel.DataAnnotations.Schema;
        using System.Linq;

        public partial class InventoryContext : DbContext
        {
            public InventoryContext()
                : base("name=InventoryContext")
            {
            }

            public virtual DbSet<Device> Devices { get; set; }
            public virtual DbSet<DeviceGroup> DeviceGroups { get; set; }

            protected override void OnModelCreating(DbModelBuilder modelBuilder)
            {
                modelBuilder.Entity<DeviceGroup>()
                    .HasMany(e => e.Devices)
                    .WithRequired(e => e.DeviceGroup)
                    .HasForeignKey(e => e.DeviceGroup_id)
                    .WillCascadeOnDelete(false);
            }
        }
    }
""")

DEVICE_CS = dedent("""
    namespace Inventory.Data
    {
        using System;
        using System.Collections.Generic;
        using System.ComponentModel.DataAnnotations;
        using System.ComponentModel.DataAnnotations.Schema;
        using System.Data.Entity.Spatial;

        [Table("device")]
        public partial class Device
        {
            [System.Diagnostics.CodeAnalysis.SuppressMessage("Microsoft.Usage", "CA2214:DoNotCallOverridableMethodsInConstructors")]
            public Device()
            {
                Devices = new HashSet<Device>();
            }

            [Key]
            [DatabaseGenerated(DatabaseGeneratedOption.Identity)]
            public int id { get; set; }

            [Required]
            [StringLength(50)]
            public string name { get; set; }

            public string comment { get; set; }

            public int DeviceGroup_id { get; set; }

            public int? parent_Device_id { get; set; }

            public virtual DeviceGroup DeviceGroup { get; set; }

            public virtual Device Parent { get; set; }

            [System.Diagnostics.CodeAnalysis.SuppressMessage("Microsoft.Usage", "CA2227:CollectionPropertiesShouldBeReadOnly")]
            public virtual ICollection<Device> Devices { get; set; }
        }
    }
""")

DEVICE_GROUP_CS = dedent("""
    namespace Inventory.Data
    {
        using System;
        using System.Collections.Generic;
        using System.ComponentModel.DataAnnotations;
        using System.ComponentModel.DataAnnotations.Schema;
        using System.Data.Entity.Spatial;

        [Table("device_group")]
        public partial class DeviceGroup
        {
            [System.Diagnostics.CodeAnalysis.SuppressMessage("Microsoft.Usage", "CA2214:DoNotCallOverridableMethodsInConstructors")]
            public DeviceGroup()
            {
                Devices = new HashSet<Device>();
            }

            [Key]
            public int id { get; set; }

            [Required]
            [StringLength(100)]
            public string name { get; set; }

            [System.Diagnostics.CodeAnalysis.SuppressMessage("Microsoft.Usage", "CA2227:CollectionPropertiesShouldBeReadOnly")]
            public virtual ICollection<Device> Devices { get; set; }
        }
    }
""")


def write_model(root: Path, files: dict[str, str]) -> Path:
    """Write ``files`` (name -> content) below ``root``."""
    for name, content in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root


@pytest.fixture
def model_files() -> list[tuple[str, str]]:
    return [
        ("Model/InventoryContext.cs", CONTEXT_CS),
        ("Model/Device.cs", DEVICE_CS),
        ("Model/DeviceGroup.cs", DEVICE_GROUP_CS),
    ]


@pytest.fixture
def model_dir(tmp_path: Path) -> Path:
    return write_model(
        tmp_path,
        {
            "InventoryContext.cs": CONTEXT_CS,
            "Device.cs": DEVICE_CS,
            "DeviceGroup.cs": DEVICE_GROUP_CS,
        },
    )
